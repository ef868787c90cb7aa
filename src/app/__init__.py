"""App — orquestração, casos de uso e composição do serviço.

Subpastas:
- bootstrap/: composition root (logging, settings, wiring)
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- services/: transformações puras (consolidação)
- domain/: modelos da consulta
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas em logs estruturados

Padrão: app executa; api adapta.
"""
