import sys
import os

# to allow autodoc to discover the documented modules
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

with open(os.path.join(os.path.dirname(__file__), '..', 'VERSION')) as infile:
    release = infile.read().strip()

project = 'Votestats'
author = 'Votestats contributors'
copyright = '2026, ' + author

extensions = [
    'sphinx.ext.autodoc',
    'recommonmark',
]

autodoc_member_order = 'bysource'

source_suffix = {
    '.rst': 'restructuredtext',
    '.md': 'markdown',
}

master_doc = 'index'

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

html_theme = 'sphinxdoc'
