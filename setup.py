from setuptools import setup
import sys

if sys.version_info < (3, 9):
    print('Sorry, focus-window requires Python version 3.9+.')
    sys.exit()

with open('README.md') as fh:
    long_description = fh.read()

setup(
    name='focus-window',
    version='0.1.0',

    description='Fixed-capacity, sorted, deduplicated window over a stream of keyed items, anchored on a focused item',
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=['focus_window', 'focus_window.core', 'focus_window.utils'],
    python_requires='>=3.9',
    install_requires=['sortedcontainers', 'PyYAML'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['focus-window = focus_window.__main__:cli']},
)
