from pathlib import Path
from setuptools import find_packages, setup

package_name = 'whill_info_display'
share_dir = Path('share') / package_name

data_files = [
    ('share/ament_index/resource_index/packages', ['resource/' + package_name]),
    ('share/' + package_name, ['package.xml']),
]

for folder in ('launch', 'config'):
    root = Path(folder)
    if not root.exists():
        continue
    files = [str(path) for path in sorted(root.glob('*')) if path.is_file()]
    if files:
        data_files.append((str(share_dir / folder), files))

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=data_files,
    install_requires=['setuptools', 'numpy'],
    zip_safe=True,
    maintainer='whill',
    maintainer_email='dev@example.com',
    description='Travel distance calculator and RViz overlay telemetry for WHILL.',
    license='MIT',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'rviz_info_display = whill_info_display.rviz_info_display:main',
            'distance_calculator_node = whill_info_display.distance_calculator_node:main',
            'whill_info_publisher_node = whill_info_display.whill_info_publisher_node:main',
        ],
    },
)
