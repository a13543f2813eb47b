"""Configuração do pytest para o whatsapp_cloud."""

import sys
from pathlib import Path

# Permite rodar os testes sem instalar o pacote e importar tests/fakes
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
