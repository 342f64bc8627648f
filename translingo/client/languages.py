DEFAULT_SOURCE_LANGUAGE = "en"

# 界面上可选的语言，顺序即下拉框顺序
LANGUAGE_NAMES = {
    "en": "English",
    "fil": "Filipino",
    "es": "Spanish",
    "pt": "Portuguese",
    "fr": "French",
    "de": "German",
    "hi": "Hindi",
    "ja": "Japanese",
    "ko": "Korean",
    "pa": "Punjabi",
    "ru": "Russian",
    "th": "Thai",
    "vi": "Vietnamese",
    "ar": "Arabic",
    "it": "Italian",
    "nl": "Dutch",
    "sv": "Swedish",
    "da": "Danish",
    "no": "Norwegian",
    "pl": "Polish",
    "tr": "Turkish",
    "he": "Hebrew",
    "cs": "Czech",
    "hu": "Hungarian",
}


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, code)
