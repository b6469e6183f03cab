"""
Circle Progress - anel de progresso circular animado
"""
__version__ = "0.1.0"
