"""Core del layer de modelos: dominio, fechas, errores y configuración.

Por qué separado de `adapters`:
- El Core no hace I/O; los adaptadores (codec JSON, exportador) dependen de
  él y no al revés.
"""
