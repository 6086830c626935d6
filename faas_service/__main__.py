from faas_service.main import run

run()
