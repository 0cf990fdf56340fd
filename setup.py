import setuptools

setuptools.setup(
	name='splice-tools',
	version='0.1.0',
	packages=[
		'splicetools',
		'splicetools.macros',
		'splicetools.scanning',
		'splicetools.support',
	],
	description='Compile-time token rewriting: paste identifiers together, and friends',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Code Generators",
		"Development Status :: 3 - Alpha",
    ],
)
