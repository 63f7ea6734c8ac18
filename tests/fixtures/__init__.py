"""Test fixtures for raml2html.

This package provides sample RAML documents for integration and
end-to-end testing.

Sample APIs:
- apis/example.raml: Songs API with nested resources, includes and security
- apis/broken.raml: Invalid YAML, for parse failure tests
"""

from pathlib import Path

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Path to sample API descriptions
APIS_DIR = FIXTURES_DIR / "apis"

EXAMPLE_RAML_PATH = APIS_DIR / "example.raml"
BROKEN_RAML_PATH = APIS_DIR / "broken.raml"
