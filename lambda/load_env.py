#!/usr/bin/env python3
"""
Carrega variáveis de ambiente do .env para execuções locais
Uso: python load_env.py [comando]
Exemplo: python load_env.py pytest tests/unit
"""
import os
import subprocess
import sys
from pathlib import Path

SENSITIVE_MARKERS = ('KEY', 'SECRET', 'PASSWORD', 'TOKEN')


def parse_env_file(env_path: Path) -> dict:
    """Lê pares KEY=VALUE do arquivo (comentários e linhas vazias ignorados)"""
    env_vars = {}

    if not env_path.exists():
        print(f"❌ Arquivo {env_path} não encontrado!")
        return env_vars

    with open(env_path, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue

            key, value = line.split('=', 1)
            if key.startswith('export '):
                key = key[len('export '):]
            env_vars[key.strip()] = value.strip().strip('"').strip("'")

    return env_vars


def mask(key: str, value: str) -> str:
    """Oculta valores sensíveis (ex.: OPENWEATHER_API_KEY)"""
    if any(marker in key.upper() for marker in SENSITIVE_MARKERS):
        return f"***{value[-4:]}" if value else "***"
    return value


def main():
    # .env fica na raiz do repositório
    env_path = Path(__file__).parent.parent / '.env'
    env_vars = parse_env_file(env_path)

    if not env_vars:
        sys.exit(1)

    for key, value in env_vars.items():
        print(f"  ✅ {key}={mask(key, value)}")

    if 'OPENWEATHER_API_KEY' not in env_vars:
        print("⚠️  OPENWEATHER_API_KEY ausente: requisições retornarão 503")

    if len(sys.argv) > 1:
        print(f"\n🚀 Executando: {' '.join(sys.argv[1:])}\n")
        env = os.environ.copy()
        env.update(env_vars)
        result = subprocess.run(sys.argv[1:], env=env)
        sys.exit(result.returncode)

    print(f"\n✅ {len(env_vars)} variáveis carregadas!")


if __name__ == '__main__':
    main()
