SERVICE_NAME = "statedb"
