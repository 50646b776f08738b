"""
Erros de validação do polígono (camada de modelo)

O algoritmo de preenchimento nunca levanta exceções; estas classes são
usadas antes de chamá-lo, quando a interface precisa avisar o usuário.
"""


class PolygonError(ValueError):
    """Base para polígonos que não podem ser fechados, preenchidos ou salvos"""
    title = "Polígono Inválido"


class TooFewVerticesError(PolygonError):
    def __init__(self, count: int, required: int = 3):
        super().__init__(
            f"Um polígono precisa de pelo menos {required} pontos "
            f"(recebidos: {count})."
        )
        self.count = count
        self.required = required


class PolygonNotClosedError(PolygonError):
    title = "Polígono Não Fechado"

    def __init__(self):
        super().__init__("O polígono precisa estar fechado antes de preencher.")


class CollinearPolygonError(PolygonError):
    def __init__(self):
        super().__init__(
            "Os pontos são colineares (estão todos na mesma linha). "
            "Um polígono válido precisa de pontos que formem uma área."
        )
