"""
Purchases App - Scrap purchase books.

Records purchases from feriwalas (paid in full on the spot) and kabadiwalas
(paid in full, in part or later). Every line is priced from the vendor's rate
card, and the money paid out is posted to the ledger of the funding account.
Header, lines, payment and ledger entry are written in one atomic scope.
"""
