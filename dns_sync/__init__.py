"""
Sincronizacion DNS -> Stock / Store.

Job programado que lee accesorios y planes de mantenimiento desde DNS
y los reconcilia contra las bases Stock y Store.
"""

__version__ = "1.0.0"
