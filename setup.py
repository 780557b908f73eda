from setuptools import setup, find_packages

setup(
   name='hubctrl',
   version='1.0',
   description='list USB hubs, report downstream port status and switch per-port power',
   author='',
   author_email='',
   packages=find_packages(exclude=['tests', 'tests.*']),
   install_requires=['pyusb', 'prompt-toolkit'], #external packages as dependencies
   entry_points={
       'console_scripts': [
           'hub-ctrl=hubctrl.cli:main',
       ]
   },
)
