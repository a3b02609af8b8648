"""
resettoken setup script
"""
#=============================================================================
# init script env -- ensure cwd = root of source dir
#=============================================================================
import os
root_dir = os.path.abspath(os.path.join(__file__, ".."))
os.chdir(root_dir)

#=============================================================================
# imports
#=============================================================================
import re
from setuptools import setup, find_packages

#=============================================================================
# version string
#=============================================================================

# pull version string from resettoken, without importing it
# (runtime dependencies may not be installed yet)
with open(os.path.join(root_dir, "resettoken", "__init__.py")) as fh:
    version = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.M).group(1)

#=============================================================================
# static text
#=============================================================================
SUMMARY = "time-limited, secret-derived tokens for password reset flows"

DESCRIPTION = """\
resettoken derives short, URL-safe one-time tokens from a user secret
(e.g. the stored password hash) and the current time step, and verifies
them later against the same secret, without storing any state.

Tokens are HMAC-SHA256 digests of the time step counter, keyed by the
salted secret, rendered using base58. A token stops verifying as soon as
the user's secret changes or the configured window has passed.
"""

KEYWORDS = """\
password reset token totp hotp hmac base58
"""

CLASSIFIERS = """\
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python :: 3
Programming Language :: Python :: Implementation :: CPython
Programming Language :: Python :: Implementation :: PyPy
Topic :: Security :: Cryptography
Topic :: Software Development :: Libraries
""".splitlines()

if '.dev' in version:
    CLASSIFIERS.append("Development Status :: 3 - Alpha")
elif '.post' in version:
    CLASSIFIERS.append("Development Status :: 4 - Beta")
else:
    CLASSIFIERS.append("Development Status :: 5 - Production/Stable")

#=============================================================================
# run setup
#=============================================================================
setup(
    # package info
    packages=find_packages(root_dir, include=["resettoken", "resettoken.*"]),
    zip_safe=True,
    python_requires=">=3.8",

    # metadata
    name="resettoken",
    version=version,
    license="BSD",

    description=SUMMARY,
    long_description=DESCRIPTION,
    keywords=KEYWORDS,
    classifiers=CLASSIFIERS,

    install_requires=[
        "base58>=2.1",
        "typing_extensions>=4.1",
    ],

    extras_require={
        "test": [
            "pytest>=7",
            "pytest-archon>=0.0.6",
        ],
    },
)

#=============================================================================
# eof
#=============================================================================
