from setuptools import find_packages, setup

setup(
  name="edvrf",
  version="0.1.0",
  description="Verification of Ed25519 VRF proofs with SHAKE256 and Elligator 2 hashing",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(include=["edvrf", "edvrf.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "colorama>=0.4",
    "tqdm>=4.62",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "pynacl>=1.4", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(
    console_scripts=["edvrf = edvrf.__main__:main"],
  ),
)
