"""Key triple for the master address.

The master address is KEY_A ^ KEY_B ^ KEY_C truncated to the low 160 bits.
None of the keys is an address on its own.
"""

KEY_A = 0x5C4E3D2B1A09F8E7D6C5B4A39281706F5E4D3C2B1A09F8E7D6C5B4A392817060
KEY_B = 0x1F2E3D4C5B6A79880A1B2C3D4E5F60718293A4B5C6D7E8F90112233445566778
KEY_C = 0x73A1B2C3D4E5F60718293A4B5C6D7E8F9A0B1C2D3E4F5061728394A5B6C7D8E9
