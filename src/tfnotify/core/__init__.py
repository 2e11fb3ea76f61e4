"""
Core do tfnotify.

Este pacote reúne a resolução de configuração consumida pela CLI e pelos
clientes de notificação.

Componentes principais:
    - ci      → identificadores de CI, plataformas, detecção pelo ambiente
    - config  → modelo, busca, carga, complemento, validação e seleção
    - context → log estruturado de eventos da resolução
    - errors  → payloads de erro serializáveis para a CLI

Limites explícitos:
    - Não realiza I/O de rede
    - Não depende da CLI
"""
