"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2 y dataclasses):
configuración del cliente, descriptores de endpoint, reglas de validación y
los tipos de wire de cada API en `schemas/`.
"""
