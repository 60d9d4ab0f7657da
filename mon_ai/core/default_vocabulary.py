# Seeded at startup with insert-or-ignore; existing rows are never overwritten.
DEFAULT_VOCABULARY = {
    "i": "အဲ",
    "you": "မၞး",
    "he": "ဍေံ",
    "she": "ဍေံ",
    "it": "ဂှ်",
    "we": "ပိုဲ",
    "they": "ဍေံတအ်",
    "go": "အာ",
    "eat": "စ",
    "book": "လိက်",
    "school": "ဘာ",
    "tell": "လဴထ္ၜး",
    "am": "ဒှ်",
    "is": "ဒှ်",
    "are": "ဒှ်",
    "tired": "ဍောၚ်ၜိုတ်",
    "home": "သ္ၚိ",
    "house": "သ္ၚိ",
    "banana": "ဗြာတ်",
    "wait for": "မၚ်",
    "waiting for": "မၚ်",
    "look for": "ဂၠာဲ",
    "looking for": "ဂၠာဲ",
    "like to": "ဒး",
    "need to": "ဒး",
    "soon": "ခြာဟွံလအ်",
}
