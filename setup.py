"""
Subway Admin - Package Build Script

지하철 역/노선 관리 API 서버 패키지
"""

from setuptools import setup, find_packages


setup(
    name='subway-admin',
    version='1.0.0',
    author='Subway Admin Team',
    description='Subway station and line management REST API',
    long_description='''
    FastAPI service managing subway stations and lines with duplicate-name
    validation and structured error responses. Storage is in-memory by
    default, PostgreSQL when STORAGE_BACKEND=postgres.
    ''',
    packages=find_packages(include=['subway', 'subway.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'uvicorn[standard]>=0.23.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'psycopg2-binary>=2.9',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24',
        ],
    },
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Framework :: FastAPI',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
