"""Coletor do portal denuo.be com ferramentas de consulta para agentes."""

__version__ = "1.0.0"
