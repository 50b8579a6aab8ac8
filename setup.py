from setuptools import find_packages, setup

setup(
    name="ttfart",
    version="1.0.0",
    description="Render text with TrueType fonts as ASCII art",
    license="GPLv3",
    keywords=[
        "ascii-art",
        "console",
        "font",
        "terminal",
        "truetype",
    ],
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Natural Language :: English",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX",
        "Operating System :: Unix",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Fonts",
        "Topic :: Utilities",
    ],
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "Pillow>=10.1",
    ],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "ttfart=ttfart.cli:main",
        ],
    },
)
