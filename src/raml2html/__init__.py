"""raml2html - RAML to HTML documentation generator.

raml2html turns a RAML API description into a single HTML page using
Jinja2 templates and a small library of markdown formatting helpers.

Core principles:
- Deterministic output: methods are always listed in canonical verb order
- Pluggable templates: main template and partials can be overridden per call
- Scoped rendering: every render owns its template environment
- CI/CD Compatibility: No interactive prompts, meaningful exit codes
"""

__version__ = "0.1.0"
__author__ = "raml2html Contributors"
