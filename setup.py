#!/usr/bin/env python3
"""
Setup script for Sign Chat
"""

from setuptools import setup

CORE_REQUIREMENTS = [
    "PyYAML",
    "fastapi",
    "pydantic>=2",
    "python-dotenv",
    "uvicorn",
]

CAMERA_REQUIREMENTS = [
    "numpy",
    "opencv-python<5",
    "mediapipe<0.10.30",
]

TEST_REQUIREMENTS = [
    "pytest",
    "httpx",
]

setup(
    name="signchat",
    version="0.1.0",
    description="Template-based sign language recognition from hand landmarks, with a chat backend",
    packages=["signchat"],
    package_data={"signchat": ["config.default.yaml"]},
    python_requires=">=3.9",
    install_requires=CORE_REQUIREMENTS,
    extras_require={
        "camera": CAMERA_REQUIREMENTS,
        "test": TEST_REQUIREMENTS,
    },
    entry_points={
        "console_scripts": [
            "signchat-server=signchat.server:main",
        ],
    },
)
