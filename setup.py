from glob import glob
from setuptools import setup


setup(
    name='srpn',
    use_scm_version={
        # Not every checkout is a git one.
        'fallback_version': '1.0.0',
    },
    description='Saturated RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    packages=['srpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    scripts=glob('bin/*'),
    license='ISC',
)
