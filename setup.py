"""
vcardwriter: module for writing vCard 3.0 files

Description
-----------

Serializes structured contact records to vCard 3.0 (RFC 2426) unicode
strings: backslash escaping of text values, quoting of parameter values,
75 character line folding and the optional MIME Content-Type header.
Multiple URLs are grouped as itemN.URL with Apple's X-ABLabel so iOS and
macOS clients show a label for each of them.

Requirements
------------

Requires python 3.8 or later, dateutil 2.7.0 or later and pytz.

Recent changes
--------------
    - JSON loader and the vcard_format command line tool
"""

from setuptools import setup, find_packages

doclines = (__doc__ or '').splitlines()

setup(name = "vcardwriter",
      license = "Apache",
      zip_safe = True,
      version = "1.0.0",
      entry_points = {
            'console_scripts': [
                  'vcard_format = vcardwriter.cli:main',
            ]
      },
      include_package_data = True,
      python_requires = ">=3.8",
      install_requires = ["python-dateutil >= 2.7.0", "pytz"],
      extras_require = {"test": ["pytest"]},
      platforms = ["any"],
      packages = find_packages(exclude=["tests", "tests.*"]),
      description = "A Python package for creating vCard 3.0 files",
      long_description = "\n".join(doclines[2:]),
      keywords = ['vcard', 'vcf', 'rfc2426', 'contacts'],
      test_suite="tests",
      classifiers =  """
      Development Status :: 5 - Production/Stable
      Environment :: Console
      Intended Audience :: Developers
      License :: OSI Approved :: Apache Software License
      Natural Language :: English
      Operating System :: OS Independent
      Programming Language :: Python
      Programming Language :: Python :: 3
      Topic :: Text Processing""".strip().splitlines()
      )
