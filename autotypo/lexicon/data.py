"""
Built-in lexicon tables.

Process-wide constant data: every table is wrapped in a read-only
mapping and shared by all engines. Per-engine custom and learned
entries live in LexiconStore overlays and never touch these tables.
"""

from types import MappingProxyType

# =============================================================================
# COMMON MISSPELLINGS
# =============================================================================

# Identity entries (e.g. "disappoint") protect correctly spelled words
# that sit close to misspellings.
COMMON_MISSPELLINGS = MappingProxyType(
    {
        # A
        "abreviat": "abbreviate",
        "accomodate": "accommodate",
        "acheive": "achieve",
        "accross": "across",
        "agressive": "aggressive",
        "apparant": "apparent",
        # B
        "basicly": "basically",
        "becuase": "because",
        "begining": "beginning",
        "belive": "believe",
        "buisness": "business",
        # C
        "calender": "calendar",
        "catagory": "category",
        "cemetary": "cemetery",
        "cheif": "chief",
        "collegue": "colleague",
        "comming": "coming",
        "commited": "committed",
        "comparision": "comparison",
        "completly": "completely",
        # D
        "definately": "definitely",
        "definitly": "definitely",
        "definatly": "definitely",
        "developement": "development",
        "diffrent": "different",
        "disappoint": "disappoint",
        # E
        "embarass": "embarrass",
        "enviroment": "environment",
        "exagerate": "exaggerate",
        "excede": "exceed",
        "existance": "existence",
        "experiance": "experience",
        # F
        "familar": "familiar",
        "finaly": "finally",
        "foriegn": "foreign",
        "fourty": "forty",
        "freind": "friend",
        # G
        "goverment": "government",
        "gaurd": "guard",
        "guage": "gauge",
        # H
        "happend": "happened",
        "harrassment": "harassment",
        "heighth": "height",
        # I
        "imediate": "immediate",
        "independant": "independent",
        "indispensible": "indispensable",
        "intresting": "interesting",
        "interuption": "interruption",
        "irrevelant": "irrelevant",
        # J, K
        "judgement": "judgment",
        "knowlege": "knowledge",
        # L
        "libary": "library",
        "lisence": "license",
        # M
        "maintainance": "maintenance",
        "manuever": "maneuver",
        "millenium": "millennium",
        "miniscule": "minuscule",
        "misspell": "misspell",
        # N
        "neccessary": "necessary",
        "necesary": "necessary",
        "neighbour": "neighbor",
        "noticable": "noticeable",
        # O
        "ocasion": "occasion",
        "occassion": "occasion",
        "occurance": "occurrence",
        "occured": "occurred",
        "ocurring": "occurring",
        # P
        "parralel": "parallel",
        "parliment": "parliament",
        "particurly": "particularly",
        "passtime": "pastime",
        "persistant": "persistent",
        "pharoah": "pharaoh",
        "peice": "piece",
        "politican": "politician",
        "posession": "possession",
        "prefered": "preferred",
        "pregnent": "pregnant",
        "presense": "presence",
        "priviledge": "privilege",
        "pronounciation": "pronunciation",
        # Q
        "questionaire": "questionnaire",
        # R
        "recieve": "receive",
        "recomend": "recommend",
        "refered": "referred",
        "referance": "reference",
        "relevent": "relevant",
        "religous": "religious",
        "repitition": "repetition",
        "resistence": "resistance",
        "responsibilty": "responsibility",
        "rythm": "rhythm",
        # S
        "scenerio": "scenario",
        "secratary": "secretary",
        "seperate": "separate",
        "shedule": "schedule",
        "sieze": "seize",
        "similer": "similar",
        "sincerely": "sincerely",
        "speach": "speech",
        "succesful": "successful",
        "supercede": "supersede",
        "supress": "suppress",
        "suprise": "surprise",
        # T
        "tomatos": "tomatoes",
        "tommorow": "tomorrow",
        "tommorrow": "tomorrow",
        "truely": "truly",
        "tyrany": "tyranny",
        # U
        "underate": "underrate",
        "untill": "until",
        "unuseual": "unusual",
        # V
        "vaccum": "vacuum",
        "vegetation": "vegetation",
        "visious": "vicious",
        # W
        "wether": "whether",
        "wierd": "weird",
        "wellcome": "welcome",
        "whereever": "wherever",
        # X, Y, Z
        "yeild": "yield",
    }
)

# =============================================================================
# LETTER TRANSPOSITIONS
# =============================================================================

COMMON_TRANSPOSITIONS = MappingProxyType(
    {
        "teh": "the",
        "adn": "and",
        "waht": "what",
        "taht": "that",
        "thier": "their",
        "thna": "than",
        "wiht": "with",
        "nad": "and",
        "ahve": "have",
        "acn": "can",
        "tiem": "time",
        "owuld": "would",
        "owrk": "work",
        "abotu": "about",
        "firend": "friend",
        "herat": "heart",
        "slef": "self",
    }
)

# =============================================================================
# CONTRACTIONS (typed without the apostrophe)
# =============================================================================

# "its", "id", "ill" and "hell" are also real words; without a grammar
# model they are always expanded.
COMMON_CONTRACTIONS = MappingProxyType(
    {
        "dont": "don't",
        "cant": "can't",
        "wont": "won't",
        "isnt": "isn't",
        "arent": "aren't",
        "youre": "you're",
        "theyre": "they're",
        "wouldnt": "wouldn't",
        "couldnt": "couldn't",
        "shouldnt": "shouldn't",
        "hasnt": "hasn't",
        "havent": "haven't",
        "didnt": "didn't",
        "doesnt": "doesn't",
        "hadnt": "hadn't",
        "ive": "I've",
        "youve": "you've",
        "weve": "we've",
        "theyve": "they've",
        "im": "I'm",
        "hes": "he's",
        "shes": "she's",
        "its": "it's",
        "thats": "that's",
        "wheres": "where's",
        "heres": "here's",
        "theres": "there's",
        "id": "I'd",
        "youd": "you'd",
        "hed": "he'd",
        "shed": "she'd",
        "itd": "it'd",
        "theyd": "they'd",
        "ill": "I'll",
        "youll": "you'll",
        "hell": "he'll",
        "shell": "she'll",
        "itll": "it'll",
        "theyll": "they'll",
        "mustve": "must've",
        "shouldve": "should've",
        "couldve": "could've",
        "wouldve": "would've",
        "mightve": "might've",
    }
)

# Merged in this order; a later table wins on key collision
BUILTIN_LEXICON = MappingProxyType(
    {**COMMON_MISSPELLINGS, **COMMON_TRANSPOSITIONS, **COMMON_CONTRACTIONS}
)

# =============================================================================
# KEYBOARD ADJACENCY (QWERTY)
# =============================================================================

KEYBOARD_ADJACENCY = MappingProxyType(
    {
        "a": ("q", "w", "s", "z"),
        "b": ("v", "g", "h", "n"),
        "c": ("x", "d", "f", "v"),
        "d": ("s", "e", "f", "c", "x"),
        "e": ("w", "r", "d", "s"),
        "f": ("d", "r", "g", "v", "c"),
        "g": ("f", "t", "h", "b", "v"),
        "h": ("g", "y", "j", "n", "b"),
        "i": ("u", "o", "k", "j"),
        "j": ("h", "u", "k", "m", "n"),
        "k": ("j", "i", "l", "m"),
        "l": ("k", "o", "p", ";"),
        "m": ("n", "j", "k", ","),
        "n": ("b", "h", "j", "m"),
        "o": ("i", "p", "l", "k"),
        "p": ("o", "[", "l"),
        "q": ("w", "a", "1"),
        "r": ("e", "t", "f", "d"),
        "s": ("a", "w", "d", "x", "z"),
        "t": ("r", "y", "g", "f"),
        "u": ("y", "i", "j", "h"),
        "v": ("c", "f", "g", "b"),
        "w": ("q", "e", "s", "a"),
        "x": ("z", "s", "d", "c"),
        "y": ("t", "u", "h", "g"),
        "z": ("a", "s", "x"),
    }
)
