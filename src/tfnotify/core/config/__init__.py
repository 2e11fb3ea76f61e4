# src/tfnotify/core/config/__init__.py

"""
Camada de configuração do tfnotify.

Este pacote contém as estruturas e utilitários responsáveis por localizar,
carregar, complementar e validar a configuração de execução do tfnotify,
além de selecionar o notifier ativo.

Fluxo canônico:
    find_config → load_file → complement → validate → select_notifier

Princípios fundamentais:
    - Cada etapa retorna um novo `Config`; nenhum valor é mutado
    - Valores explícitos do usuário nunca são sobrescritos
    - Erros são tipados e propagados à camada chamadora

Limites explícitos:
    - Não realiza chamadas de rede aos serviços de notificação
    - Não interpreta saída do terraform nem renderiza templates
    - Não analisa argumentos de linha de comando
"""
