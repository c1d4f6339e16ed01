# src/stepchain/core/engine/__init__.py
"""
Engine do stepchain.

Componentes principais:
    - compiler → handlers → runnables ligados a uma CancellationFlag por run
    - runner   → fold síncrono e assíncrono dos runnables

Invariantes:
    - Passos nunca se sobrepõem
    - Uma flag acionada pula todos os passos seguintes da mesma run
"""
