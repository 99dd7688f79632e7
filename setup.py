from setuptools import setup, find_packages

setup(
    name="tetmesh_io",
    version="0.1.0",
    description="Reader for MEDIT .mesh tetrahedral volume meshes",
    author="tetmesh_io Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
    ],
    extras_require={
        "dev": ["pytest>=6.0", "meshio>=5.0"],
    },
)
