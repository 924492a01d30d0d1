"""Serviços expostos pelo projeto: disparo da coleta e ferramentas de consulta."""
