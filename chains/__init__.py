from chains.ethereum import ethereum
