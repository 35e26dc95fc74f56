"""Greek character rewrite tables for fuzzy lexicon lookups."""

# Long/short marked vowels -> unmarked base letter; macron and breve marks dropped
VOWEL_LENGTH_MAP = str.maketrans({
    "\u1FB0": "\u03B1", "\u1FB1": "\u03B1",
    "\u1FB8": "\u0391", "\u1FB9": "\u0391",
    "\u1FD0": "\u03B9", "\u1FD1": "\u03B9",
    "\u1FD8": "\u0399", "\u1FD9": "\u0399",
    "\u1FE0": "\u03C5", "\u1FE1": "\u03C5",
    "\u1FE8": "\u03A5", "\u1FE9": "\u03A5",
    "\u00AF": None,  # macron
    "\u0304": None,  # combining macron
    "\u0306": None,  # combining breve
})

# Letters and accent signs with diaeresis -> same without diaeresis; diaeresis marks dropped
DIAERESIS_MAP = str.maketrans({
    "\u0390": "\u03AF",
    "\u03AA": "\u0399",
    "\u03AB": "\u03A5",
    "\u03B0": "\u03CD",
    "\u03CA": "\u03B9",
    "\u03CB": "\u03C5",
    "\u1FD2": "\u1F76",
    "\u1FD3": "\u1F77",
    "\u1FD7": "\u1FD6",
    "\u1FE2": "\u1F7A",
    "\u1FE3": "\u1F7B",
    "\u1FE7": "\u1FE6",
    "\u1FC1": "\u1FC0",
    "\u1FED": "\u1FEF",
    "\u1FEE": "\u1FFD",
    "\u00A8": None,  # diaeresis
    "\u0308": None,  # combining diaeresis
})

STRIPPED_VOWEL_LENGTH = "strippedVowelLength"
STRIPPED_DIAERESIS = "strippedDiaeresis"
