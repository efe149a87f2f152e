"""initgen -- build-system file generation for scaffolded JVM projects.

Models Gradle builds (plugins, dependencies and nested extension blocks such
as ``kotlin { compilerOptions { ... } }``) and Docker Compose service lists,
and renders them as deterministic text.
"""

__version__ = "0.1.0"
