# DEPENDENCIES
from setuptools import setup
from setuptools import find_packages


# Read the long description from README.md if it exists

readme_path = "README.md"

try:
    with open(readme_path, "r", encoding="utf-8") as fh:
        long_description = fh.read()

except FileNotFoundError:
    long_description = "Clause-level risk analysis of contracts under the Indian Contract Act, 1872"

setup(name                          = "contract-clause-risk",
      version                       = "1.0.0",
      description                   = "Detects and scores risky contract clauses under the Indian Contract Act, 1872.",
      long_description              = long_description,
      long_description_content_type = "text/markdown",
      packages                      = find_packages(include = ["config", "config.*", "services", "services.*", "utils", "utils.*", "model_manager", "model_manager.*"]),
      py_modules                    = ["build_index"],
      classifiers                   = ["Development Status :: 4 - Beta",
                                       "Intended Audience :: Legal Industry",
                                       "Operating System :: OS Independent",
                                       "Programming Language :: Python :: 3",
                                       "Programming Language :: Python :: 3.10",
                                       "Programming Language :: Python :: 3.11",
                                      ],
      python_requires               = ">=3.10",
      install_requires              = ["pydantic>=2.5.0",
                                       "pydantic-settings>=2.1.0",
                                       "torch>=2.1.0",
                                       "sentence-transformers>=2.2.2",
                                       "numpy>=1.24.0",
                                       "requests>=2.31.0",
                                       "anyio>=4.0.0",
                                      ],
      extras_require                = {"test" : ["pytest>=7.4.0"],
                                       "dev"  : ["black>=23.10.0", "isort>=5.12.0", "flake8>=6.0.0", "pytest>=7.4.0"],
                                      },
      entry_points                  = {"console_scripts": ["contract-risk-build-index=build_index:main"]},
      include_package_data          = True,
     )
