"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='conlang',
	version='0.0.1',
	packages=['conlang', ],
	entry_points={
		'console_scripts': ["conlang = conlang.cmdline:main"],
	},
	license='MIT',
	description='A reader and read-print loop for a small constructed-language notation',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Text Processing :: Linguistic",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		"test": ["pytest"],
	},
)
