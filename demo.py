#!/usr/bin/env python3
"""
hl7slice Demo Script.

Walks through the core library features on a sample ORU^R01 message:
1. Parsing a message and discovering its delimiters.
2. Querying values by dotted path.
3. Decoding escape sequences with the message's own separators.
4. Reading the typed MSH header and a JSON summary.

Usage:
    python demo.py
"""

import sys

try:
    from hl7slice import Message, MessageSummary, MshHeaderMalformed
except ImportError as e:
    print(f"Error importing modules: {e}")
    print("Please install the package first: pip install -e .")
    sys.exit(1)

# Normally a message would arrive over MLLP from a remote system
SAMPLE_MESSAGE = (
    "MSH|^~\\&|GHH LAB|ELAB-3|GHH OE|BLDG4|200202150930||ORU^R01|CNTRL-3456|P|2.4\r"
    "PID|||555-44-4444||EVERYWOMAN^EVE^E^^^^L|JONES|19620320|F|||"
    "153 FERNWOOD DR.^^STATESVILLE^OH^35292||(206)3345232|(206)752-121||||AC555444444||"
    "67-A4335^OH^20030520\r"
    "OBR|1|845439^GHH OE|1045813^GHH LAB|15545^GLUCOSE|||200202150730|||||||||"
    "555-55-5555^PRIMARY^PATRICIA P^^^^MD^^|||||||Joes Obs \\T\\ Gynae||F||||||"
    "444-44-4444^HIPPOCRATES^HOWARD H^^^^MD\r"
    "OBX|1|SN|1554-5^GLUCOSE^POST 12H CFST:MCNC:PT:SER/PLAS:QN||^182|mg/dl|70_105|H|||F"
)


def main() -> None:
    print("--- 1. Parse ---")
    message = Message.parse(SAMPLE_MESSAGE)
    print(f"Segments: {[s.identifier for s in message.segments]}")
    print(f"Encoding characters: {message.separators}")

    print("\n--- 2. Query ---")
    for path in ("MSH.F9", "MSH.F9.C2", "PID.F5.C1", "PID.F11.C5", "OBX.F5.C2", "NOPE.F1"):
        print(f"{path:<12} -> {message.query(path)!r}")

    print("\n--- 3. Decode ---")
    raw = message["OBR.F23"]
    print(f"Raw:     {raw}")
    print(f"Decoded: {message.decoder.decode(raw)}")

    print("\n--- 4. Header ---")
    header = message.msh()
    print(f"Control ID: {header.msh_10_message_control_id}")
    print(MessageSummary.from_message(message).model_dump_json(indent=2))

    print("\n--- 5. Errors ---")
    try:
        Message.parse(SAMPLE_MESSAGE[1:])
    except MshHeaderMalformed as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
