# Network used when --network is not given: anvil | sepolia
NETWORK = "anvil"

# ETH sent to every submitted address by distributeBatch()
DISTRIBUTION_AMOUNT = 100

# ETH sent from the operator wallet to the contract before distributing
FUND_AMOUNT = 1000

# Seconds to wait for a transaction receipt
TX_TIMEOUT = 120

GWEI_MULTIPLIER = 1.2

LOG_LEVEL = "DEBUG"
