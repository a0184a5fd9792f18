from setuptools import setup

setup(
	name='blockflow',
	version='1.0.0',
	description='Signal-flow simulation blocks over numeric vectors',
	url='https://github.com/evolvablehardware/blockflow.git',
	author='Vivum Inc.',
	author_email='logan@vivum.ai',
	license='GPL-3.0',
	packages=['blockflow'],
	install_requires=['numpy'],
	extras_require={
		'test': ['pytest>=7.0'],
	},

	classifiers=[
		'Development Status :: 5 - Production/Stable',
		'Intended Audience :: Science/Research',
		'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
		'Operating System :: POSIX :: Linux',
		'Programming Language :: Python :: 3',
		'Programming Language :: Python :: 3.9',
		'Programming Language :: Python :: 3.12',
	],
)
