"""
Four.Meme platform and BSC constants
"""

# Platform API
API_URL = "https://four.meme/meme-api/v1"
NETWORK_CODE = "BSC"
VERIFY_TYPE = "LOGIN"
WALLET_NAME = "MetaMask"
ACCESS_HEADER = "Meme-Web-Access"
LOGIN_MESSAGE = "You are sign in Meme {nonce}"
SUCCESS_CODES = (200, 0)

# Network
DEFAULT_RPC_URL = "https://bsc-dataseed.binance.org/"
BSCSCAN_TX_URL = "https://bscscan.com/tx/{tx_hash}"

# Contract addresses
FACTORY_ADDRESS = "0x5c952063c7fc8610FFDB798152D69F0B9550762b"
WBNB_ADDRESS = "0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

DRY_RUN_TX_HASH = "DRY_RUN_SIMULATION"

# Launch defaults
TOTAL_SUPPLY = 1000000000
RAISED_AMOUNT = 24
SALE_RATE = 0.8
LP_TRADING_FEE = 0.0025
DEFAULT_TRADE_FEE = "0.01"
TAX_TOKEN_TEMPLATE = 5
MIN_SHARING = 1000000  # Minimum balance for holder dividends
BPS_DENOMINATOR = 10000
