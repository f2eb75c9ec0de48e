import os
from dotenv import load_dotenv

# Charge le .env local (utile pour dev/local)
load_dotenv()

# --- CLÉS D'API ---
THEGRAPH_API_KEY = os.getenv("THEGRAPH_API_KEY")

# --- ENDPOINT DU SUBGRAPH HONEYSWAP (Gnosis) ---
# "[api-key]" est remplacé par la clé fournie à l'appel.
API_KEY_PLACEHOLDER = "[api-key]"
SUBGRAPH_ENDPOINT = os.getenv(
    "HONEYSWAP_SUBGRAPH_ENDPOINT",
    "https://gateway.thegraph.com/api/[api-key]/subgraphs/id/HTxWvPGcZ5oqWLYEVtWnVJDfnai2Ud1WaABiAR72JaSJ",
)

# --- CHAÎNE SUPPORTÉE ---
SUPPORTED_CHAIN_ID = "100"

# --- PAGINATION ---
PAGE_SIZE = 1000

# --- VALIDATION DES TOKENS ---
MAX_SYMBOL_LENGTH = 20
MAX_NAME_LENGTH = 50
MAX_LABEL_LENGTH = 45

# --- INFOS PROJET ---
PROJECT_NAME = "Honeyswap"
WEBSITE_LINK = "https://honeyswap.org"
