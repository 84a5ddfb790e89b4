"""frontforge -- scaffolding and build configuration for front-end projects.

Creates React apps, React components, web apps and web modules from bundled
templates, and turns command-line arguments into bundler configuration for
building standalone React entry modules.
"""

__version__ = "0.1.0"
