"""
PromptPack — prompts versionnés pour le matching investisseur ↔ entrepreneur.

Politique : un score par candidat, 2 à 3 raisons courtes, JSON strict.
"""

PROMPT_VERSION = "v1.0"

MATCHING_SYSTEM = """Vous êtes un expert en matching investisseur-entrepreneur.
Analysez les profils et donnez des scores précis et des raisons pertinentes.

RÈGLES :
1. Score 0-100 : 0 = totalement incompatible, 100 = compatibilité parfaite.
2. 2 à 3 raisons courtes par candidat, fondées sur les informations fournies.
3. N'inventez pas d'informations absentes des profils."""

# ── Investisseur → projets ────────────────────────────────

INVESTOR_USER = """Analysez la compatibilité entre cet investisseur et les projets suivants.

PROFIL INVESTISSEUR :
- Nom: {full_name}
- Bio: {bio}
- Localisation: {location}
- Entreprise: {company}
- Préférences: {preferences}

PROJETS À ANALYSER :
{candidates}

{response_format}"""

# ── Entrepreneur → investisseurs ──────────────────────────

ENTREPRENEUR_USER = """Analysez la compatibilité entre cet entrepreneur et les investisseurs suivants.

PROFIL ENTREPRENEUR :
- Nom: {full_name}
- Bio: {bio}
- Localisation: {location}
- Entreprise: {company}
- Préférences: {preferences}

INVESTISSEURS À ANALYSER :
{candidates}

{response_format}"""

RESPONSE_FORMAT = """Pour chaque candidat, donnez un score de 0 à 100 et 2-3 raisons de compatibilité.
"candidate_index" est le numéro du candidat dans la liste ci-dessus.
Répondez UNIQUEMENT avec un JSON valide, sans markdown, au format exact suivant :
{
  "matches": [
    {"candidate_index": 0, "score": 85, "reasons": ["Secteur d'expertise commun", "Montant dans la fourchette préférée"]}
  ]
}"""
