from setuptools import setup, find_packages

setup(
    name='auto_constraint',
    version='0.1.0',
    description='One-way constraint networks driven by numerical gradient descent',
    author='Auto Constraint Team',
    packages=find_packages(include=['auto_constraint', 'auto_constraint.*']),
    install_requires=[
        'numpy>=1.24.0',
        'scipy>=1.10.0',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
        ]
    },
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
