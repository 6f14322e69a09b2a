from setuptools import setup, find_packages

setup(name='flashquiz',
      version='0.1.0',
      description='flashcard and multiple choice question generation',
      author='gront',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.8',
      install_requires=[
          'pandas',
      ],
      extras_require={
          'test': ['pytest'],
      },
     )
