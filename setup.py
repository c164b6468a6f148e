import setuptools

setuptools.setup(
    name = 'focalcurve',
    version = '1.0',
    description = 'smooth interpolating curves and offset contours through 2D points',
    packages = setuptools.find_packages(exclude=['tests', 'tests.*']),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
