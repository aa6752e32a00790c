# Graduate program matching engine
