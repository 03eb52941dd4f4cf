"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan los adaptadores concretos; los
servicios y las fachadas dependen del contrato, no de la implementación.
"""
