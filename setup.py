"""
Setup script for little-sorry
"""
from setuptools import setup, find_packages

setup(
    name="little-sorry",
    version="1.1.0",
    description="Regret minimization (CFR, CFR+, DCFR, Linear CFR, PCFR+, PDCFR+) and alias sampling",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        'numpy>=1.21.0',
        'scipy>=1.7.0',
        'pandas>=1.3.0',
        'matplotlib>=3.4.0',
        'seaborn>=0.12.0',
        'joblib>=1.0.0',
        'psutil>=5.8.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'little-sorry-rps=experiments.run_rps:main',
            'little-sorry-compare=experiments.compare_algorithms:main',
            'little-sorry-bench=experiments.benchmark:main',
        ],
    },
    python_requires='>=3.8',
)
