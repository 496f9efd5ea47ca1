from setuptools import find_namespace_packages, setup

package_name = "pixscale"

setup(
    name=package_name,
    version="0.1.0",
    description="Lanczos, bicubic and edge-directed image resampling on multi-core CPU and CUDA",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=[package_name, f"{package_name}.*"]),
    install_requires=[
        "numpy",
        "numba",
        "opencv-python",
        "pydantic",
        "cupy-cuda12x",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            f"{package_name}={package_name}.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
