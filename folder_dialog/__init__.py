"""
folder_dialog — client-side core of the "create folder" dialog.

Layers:
  - domain: entities, ports, gateway error parsing
  - application: validation, form, error classification, navigation,
    dialog state machine
  - infrastructure: gateways (HTTP / in-memory) and headless sinks
  - crosscutting: settings, structured logging, internal exceptions
"""

__version__ = "0.1.0"
