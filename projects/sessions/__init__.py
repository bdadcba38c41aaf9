"""
Sessões de integração (email, tarefas, OAuth).

Contém o AuthManager que persiste as sessões ativas e o migrador que
converte sessões do formato antigo na inicialização da aplicação.
"""
