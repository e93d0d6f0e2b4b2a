"""
Provides project-level commands. Commands are run via `python setup.py <command> [args]`

Commands available:

- apidoc: regenerate reST docs for inline pydoc comments
- autobuild: watch for changes to the reST files and rebuild the documentation, refreshing
   the browser.
"""

from setuptools import setup, Command

import os


class RunInRootCommand(Command):
    user_options = []

    def initialize_options(self):
        self.cwd = None

    def finalize_options(self):
        self.cwd = os.getcwd()

    def run(self):
        assert os.getcwd() == self.cwd, 'Must be in package root: %s' % self.cwd
        self.runcmd()

    def runcmd(self):
        pass


class ApiDocCommand(RunInRootCommand):
    description = "regenerates the API docs for the pipefitting package"

    def runcmd(self):
        os.system('"sphinx-apidoc" -f -e -o docs/apidoc src/pipefitting')


class AutoBuildCommand(RunInRootCommand):
    description = "watches the docs for changes and rebuilds them, automatically refreshing the browser page"

    def runcmd(self):
        os.system("sphinx-autobuild docs docs/_build/html -B")


setup(
    name='pipefitting',
    version='0.1.0',
    description='Synchronous in-process message pipes, filters, queues and tees for wiring modules together.',
    url='',
    author='',
    author_email='',
    license='LGPL',
    package_dir={'': 'src'},
    packages=['pipefitting', 'pipefitting.config', 'pipefitting.plumbing', 'pipefitting.support'],
    package_data={'pipefitting.config': ['*.cfg']},
    python_requires='>=3.6',
    install_requires=['configobj>=5.0.6'],
    extras_require={
        'test': ['PyHamcrest>=2.0', 'pytest'],
    },
    zip_safe=False,
    cmdclass={
        'apidoc': ApiDocCommand,
        'autobuild': AutoBuildCommand
    }
)
