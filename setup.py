from setuptools import setup, find_packages


setup(name='quat2eul',
      version='1.0.0',
      description='Convert rotation quaternions to euler angle sequences and back',
      packages=find_packages(include=['quat2eul', 'quat2eul.*']),
      python_requires='>=3.10',
      install_requires=['numpy'],
      extras_require={'test': ['pytest', 'scipy']},
      entry_points={'console_scripts': ['quat2eul=quat2eul.scripts.quat2eul:main']})
