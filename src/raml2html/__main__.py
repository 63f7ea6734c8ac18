"""Entry point for running raml2html as a module.

Usage:
    python -m raml2html [command] [options]

Example:
    python -m raml2html render api.raml --output api.html
    python -m raml2html validate custom.html.j2
"""

from raml2html.cli import app

if __name__ == "__main__":
    app()
