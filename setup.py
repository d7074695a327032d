import os
from setuptools import setup, find_namespace_packages

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "README.md"), "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name='sprintify-dragselect',
    version=os.environ.get("RELEASE_VERSION", "1.0.0"),
    packages=find_namespace_packages(where='src', include=['sprintify', 'sprintify.*']),
    package_dir={'': 'src'},
    install_requires=[
        'PySide6>=6.7.1',
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    author='Sami Spjuth',
    author_email='sami@spjuth.org',
    description='Rubber-band drag selection with edge auto-scroll based on PySide6',
    long_description=long_description,
    long_description_content_type="text/markdown",
    url='https://github.com/sspjuth/sprintify',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
    ],
    python_requires='>=3.9',
)
