from setuptools import setup, find_packages

setup(
    name="pyltifiltering",
    packages=find_packages(
        include=["pyltifiltering", "pyltifiltering.*"]),
    version='0.1.0',
    description="FIR and IIR linear time-invariant filters with an impulse-response stability heuristic.",
    keywords=["FIR", "IIR", "Filtering", "Digital", "Signal", "Processing"],
    python_requires=">=3.8",
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
            'scipy',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3'
    ]

)
