import setuptools

with open('README.md') as infile:
    long_description = infile.read()

with open('VERSION') as infile:
    version = infile.read().strip()

setuptools.setup(
    name='votestats',
    version=version,
    description='Descriptive statistics and distribution comparison for election data',
    long_description=long_description,
    long_description_content_type='text/markdown; charset=UTF-8',
    python_requires='>=3.8.0',
    packages=setuptools.find_packages(exclude=('tests', )),
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'docs': ['sphinx', 'recommonmark'],
    },
    include_package_data=True,
    license='MIT',
    keywords='election turnout statistics quantile histogram ecdf skewness python',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    zip_safe=True
)
