"""
Erros tipados do projeto
"""


class CircleProgressError(Exception):
    """Erro base do projeto"""


class SettingsError(CircleProgressError):
    """Arquivo de configuração inválido (YAML ou esquema)"""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Configuração inválida em {path}: {reason}")
