"""
aesgcm_crypter — Live Demo
==========================
Run:  python examples/demo_crypter.py

Walks through key generation, export/import, encryption with an
automatic IV and tamper detection, printing sizes and timings.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aesgcm_crypter import Crypter, AuthenticationFailure

LINE = "═" * 70
MSG  = b"Keep the IV next to the ciphertext."

def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')

print(f"\n{LINE}")
print("  aesgcm_crypter — AES-GCM Facade Demo")
print(LINE)
print(f"  Message: {MSG.decode()}\n")

# ── KEYS ─────────────────────────────────────────────────────────────────────
header(1, "KEYS — generate / export / import")
for bits in (128, 192, 256):
    key = Crypter.generate_key(bits)
    raw = Crypter.export_key(key)
    ok(f"AES-GCM-{bits}", f"{len(raw)} raw bytes, usages={sorted(key.usages)}")
key      = Crypter.generate_key()
imported = Crypter.import_key(Crypter.export_key(key))
ok("Re-imported key valid", str(Crypter.is_valid_key(imported)))

# ── ENCRYPT / DECRYPT ────────────────────────────────────────────────────────
header(2, "ENCRYPT / DECRYPT")
crypter = Crypter.create(key)
t0      = time.perf_counter()
ct, iv  = crypter.encrypt(MSG)
pt      = crypter.decrypt(ct, iv)
elapsed = time.perf_counter() - t0
ok("IV",          f"{iv.hex()} ({len(iv)} bytes, auto-generated)")
ok("Ciphertext",  f"{len(ct)} bytes (data + tag=16)")
ok("Round-trip",  f"{elapsed*1000:.2f} ms")
ok("Decrypted",   pt.decode())

# ── TAMPER ───────────────────────────────────────────────────────────────────
header(3, "TAMPER DETECTION")
bad = bytearray(ct)
bad[0] ^= 0x01
try:
    crypter.decrypt(bytes(bad), iv)
    print("  ✗  tampered ciphertext accepted")
    sys.exit(1)
except AuthenticationFailure:
    ok("Flipped bit rejected", "AuthenticationFailure")

print(f"\n{LINE}\n  All steps: PASSED\n{LINE}\n")
