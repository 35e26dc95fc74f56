from lexis.models.lexicon import Form, Inflection, Lemma, Translation

__all__ = [
    "Form",
    "Inflection",
    "Lemma",
    "Translation",
]
