from setuptools import setup, find_packages

setup(
    name="rpp",
    version="1.0.0",
    description="Replace the contents of a file with the current clipboard text.",
    author="Max Carlson",
    author_email="carlsonamax@gmail.com",
    package_dir={"": "modules"},
    packages=find_packages(where="modules", exclude=["*.tests", "*.tests.*", "tests"]),
    python_requires=">=3.8",
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "rpp=clipboard_tools.entrypoints:replace_main",
            "rwc=clipboard_tools.entrypoints:replace_main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
