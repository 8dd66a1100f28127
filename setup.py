#!/usr/bin/python3

import sys
from version import version

# Freezing the command line tool into a standalone executable needs
# cx_Freeze; a plain install only needs setuptools.
freeze = any(cmd in sys.argv for cmd in ('build_exe', 'bdist_msi', 'bdist_dmg', 'bdist_appimage'))
if freeze:
    from cx_Freeze import setup, Executable
else:
    from setuptools import setup


# Dependencies are automatically detected, but it might need fine tuning.
build_exe_options = {
    "excludes": ["tkinter", "unittest"],
    'zip_include_packages': ['*'],
    'zip_exclude_packages': ['numpy',
                             'numpy.libs'],
}

freeze_args = {}
if freeze:
    freeze_args = {
        'options': {'build_exe': build_exe_options,
                    'bdist_msi': {
                        'initial_target_dir': '[ProgramFilesFolder]\\VitalView',
                    },
                    },
        'executables': [Executable('vitalview.py',
                                   base=None,
                                   target_name='vitalview',
                                   )],
    }

setup(
    name = 'vitalview',
    version = version,
    description = 'Parser and query tools for VitalDB physiological recordings',
    python_requires = '>=3.10',
    packages = ['vital'],
    py_modules = ['vitalview'],
    install_requires = ['numpy'],
    extras_require = {'test': ['pytest']},
    entry_points = {'console_scripts': ['vitalview = vitalview:main']},
    include_package_data=False,
    **freeze_args
)
