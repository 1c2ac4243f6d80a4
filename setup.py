from setuptools import setup, find_packages

setup(
    name='rotkit',
    version='1.0.0',
    description="Rotation representations centred on intrinsic Z-Y'-X'' (yaw, pitch, roll) Euler angles",
    packages=find_packages(include=['rotkit', 'rotkit.*']),
    python_requires='>=3.11',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
