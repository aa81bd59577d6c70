"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='overlay-maps',
	author='The overlay developers',
	version='0.1.0',
	packages=['overlay'],
	entry_points={
		'console_scripts': ["overlay = overlay.cmdline:main"],
	},
	license='MIT',
	description='Functional total and partial maps, for environments in interpreters and type-checkers',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Software Development :: Libraries",
	],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		"test": ["pytest"],
	},
)
