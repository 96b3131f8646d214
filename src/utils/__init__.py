"""
Utilitaires pour AppReg.

- dates : arithmetique en mois calendaires et instant courant UTC
"""
