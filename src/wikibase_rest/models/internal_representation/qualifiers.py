from .snaks import Snak

# Qualifiers share the snak shape exactly.
Qualifier = Snak
