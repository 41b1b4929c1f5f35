"""Setup script for the iCalKit command-line tool and library."""

from pathlib import Path

from setuptools import find_packages, setup

HERE = Path(__file__).parent


def read_requirements(path: Path) -> tuple[list[str], list[str]]:
    """Split requirements.txt into runtime and test requirements."""
    runtime: list[str] = []
    testing: list[str] = []
    if not path.exists():
        return runtime, testing

    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        (testing if line.startswith("pytest") else runtime).append(line)
    return runtime, testing


readme_file = HERE / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""
requirements, test_requirements = read_requirements(HERE / "requirements.txt")

setup(
    name="icalkit",
    version="1.0.0",
    description="Split, merge and inspect iCalendar (.ics) files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="iCalKit Team",
    # Package configuration
    packages=find_packages(exclude=["tests*", "docs*", "config*"]),
    include_package_data=True,
    # Dependencies
    install_requires=requirements,
    extras_require={
        "test": test_requirements,
        "dev": test_requirements
        + [
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business :: Scheduling",
        "Framework :: AsyncIO",
    ],
    keywords="calendar ics icalendar split merge duplicates",
    entry_points={
        "console_scripts": [
            "icalkit=icalkit.__main__:main",
        ],
    },
    zip_safe=False,
)
