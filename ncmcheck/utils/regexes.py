NCM_CODE_RE = r"\b[0-9]{2}[^0-9]?[0-9]{2}[^0-9]?[0-9]{2}[^0-9]?[0-9]{2}\b"
NON_DIGIT_RE = r"[^0-9]"
BR_DATE_RE = r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$"
