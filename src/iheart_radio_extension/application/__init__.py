"""
Application Layer

Capability contracts the host application calls into. The extension
implements them in the infrastructure layer.
"""
