# Data type codes do not change between dictionary versions.
TYPE_DESCRIPTIONS: dict[str, str] = {
    "ID": "Identifier - unique key field",
    "X": "Text field",
    "PA": "Pick list (abbreviation)",
    "DT": "Date/Time",
    "MC": "Memo/Comments",
    "SF": "Scientific format number",
    "SCI": "Scientific notation",
    "DMS": "Degrees Minutes Seconds",
    "T": "Time",
    "U": "Units (legacy)",
    "YN": "Yes/No",
    "PU": "Pick Unit",
    "PT": "Pick Type",
    "DP": "Decimal places (variable)",
    "0DP": "0 decimal places",
    "1DP": "1 decimal place",
    "2DP": "2 decimal places",
    "3DP": "3 decimal places",
    "4DP": "4 decimal places",
    "5DP": "5 decimal places",
}

ROW_TYPE_DESCRIPTIONS: dict[str, str] = {
    "GROUP": "Defines a new data group",
    "HEADING": "Column headings for the group",
    "UNIT": "Units for each column",
    "TYPE": "Data type for each column",
    "DATA": "Data row",
}

# Fallback for groups the dictionary does not know.
USER_DEFINED_GROUP = "User-defined group"
