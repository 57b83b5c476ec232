import setuptools

setuptools.setup(
	name='kombi',
	version='0.1.0',
	packages=[
		'kombi',
		'kombi.json',
		'kombi.support',
	],
	description='Parser combinators over zero-copy string views, with a JSON grammar to show them off',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Libraries :: Python Modules",
		"Development Status :: 3 - Alpha",
    ],
)
