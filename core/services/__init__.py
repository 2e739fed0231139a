"""
core/services/
Camada de serviços do Impulse Dashboard.

Contém a montagem dos view-models, agnóstica à interface:
- chrome      : Header, sidebar e navbar comuns às páginas.
- statistics  : Distribuições de SO / família de SO.
- system      : Fan-out sistema → interfaces → endereços → regras.
"""
