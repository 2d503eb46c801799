"""Built-in word list for the diabetes-education crossword."""

from __future__ import annotations

from models import WordEntry

_WORDS: list[tuple[str, str]] = [
    ("GLICOSE", "Principal fonte de energia para o corpo."),
    ("INSULINA", "Hormônio que ajuda a glicose a entrar nas células."),
    ("DIABETES", "Condição em que o corpo não produz ou não usa insulina adequadamente."),
    ("HIPOGLICEMIA", "Nível baixo de açúcar no sangue."),
    ("HIPERGLICEMIA", "Nível alto de açúcar no sangue."),
    ("ENERGIA", "O que a glicose fornece ao corpo."),
    ("ACUCAR", "Substância doce que se transforma em glicose no corpo."),
    ("CELULAS", 'As "casas" do corpo que precisam de energia.'),
    ("SANGUE", "Transporta a glicose pelo corpo."),
    ("TRATAMENTO", "Conjunto de cuidados para controlar o diabetes."),
    ("EXERCICIOS", "Atividade física que ajuda a controlar o açúcar no sangue."),
    ("ALIMENTACAO", "Dieta e nutrição para diabéticos."),
    ("MEDIR", "Verificar o nível de glicose no sangue."),
    ("SINTOMAS", "Sinais de hipoglicemia ou hiperglicemia."),
]


def get_word_bank() -> list[WordEntry]:
    """Return a fresh list of the built-in entries, in their listed order."""
    return [WordEntry(text=text, clue=clue) for text, clue in _WORDS]
