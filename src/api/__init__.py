"""API — camada de borda do relay.

Responsabilidades:
- Receber requests HTTP dos chamadores
- Validar entradas (API key, CNAEs, limite, tipo de resultado)
- Chamar a API externa Casa dos Dados e traduzir seus erros

Subpastas:
- connectors/: cliente HTTP da Casa dos Dados
- validators/: validação de entradas
- routes/: endpoints HTTP (consulta, health, documentação de uso)

NÃO PODE conter: orquestração de use cases ou consolidação de resultados.
"""
