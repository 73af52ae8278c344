from cep_mcp.main import main

main()
