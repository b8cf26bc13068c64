from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='SegTrie',
    version='0.0.1',
    description='prefix trie over sequences of segments, with longest-prefix match',
    long_description=long_description,
    long_description_content_type="text/markdown",
    author='reserveword',
    author_email='reserveword@outlook.com',
    url='www.github.com/reserveword/SegTrie',
    packages=find_packages(where="src"),
    platforms='any',
    license='GPLv3+',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    install_requires=[
        'chardet',
        'sortedcontainers',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['segtrie=segtrie.__main__:main'],
    },
    python_requires='>=3.11'
)
