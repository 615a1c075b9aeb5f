"""
Introspection Context

Responsibilities:
- Lists methods and fields of a class using runtime annotations
- Reads raw instance storage and invokes methods by name

Owns: Reflector, FieldInfo
Never: Modifies the classes or instances it inspects
"""

from skillbench.contexts.introspection.reflector import FieldInfo, Reflector

__all__ = ["FieldInfo", "Reflector"]
