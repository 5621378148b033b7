"""TimeKeeper Source Package.

Pure logic behind the TimeKeeper desktop demos: the file loader form,
the registration form, and the biorhythm calculator.

Layers:
    - core: Configuration, logging, exceptions
    - models: Form snapshots and their validation
    - engine: Biorhythm cycles and chart coordinates
    - integrations: Workbook sheet discovery
"""

__version__ = "0.1.0"
