import os.path

import setuptools

root_dir = os.path.abspath(os.path.dirname(__file__))
readme_file = os.path.join(root_dir, 'README.rst')
with open(readme_file, encoding='utf-8') as f:
    long_description = f.read()

install_requires = [
    'attrs',
]

setuptools.setup(
    name='sdpjson',
    version='0.1.0',
    description='Session Description Protocol (SDP) parser with JSON output',
    long_description=long_description,
    license='BSD',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    packages=['sdpjson'],
    python_requires='>=3.5',
    setup_requires=[],
    install_requires=install_requires,
    entry_points={
        'console_scripts': ['sdpjson=sdpjson.__main__:main'],
    },
)
