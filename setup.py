from setuptools import setup, find_packages

setup(
    name='eyeview',
    version='0.1.0',
    author='nassimberrada',
    author_email='your.email@example.com',
    description='A Python library for projecting 3D points onto a camera view screen set up by eye position, azimuth and altitude.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/yourusername/eyeview',
    packages=find_packages(exclude=['tests', 'examples']),
    include_package_data=True,
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics :: 3D Rendering',
        'Topic :: Scientific/Engineering :: Visualization',
    ],
    python_requires='>=3.6',
)
