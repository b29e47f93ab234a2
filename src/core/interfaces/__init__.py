"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el comando depende de abstracciones y los
  tests pueden inyectar dobles sin red.
"""
