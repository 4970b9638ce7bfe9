from setuptools import setup

setup(
    name='prism',
    version='0.0.1',
    description='Strided views over a shared, read-only float32 buffer',
    author='Philip Thomsen',
    license='MIT',
    packages=['prism'],
    python_requires='>=3.10',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
