"""
Pre-built assets shown by the diagnostics panel.
"""

ICON_DATA_URI = (
    "data:image/x-icon;base64,AAABAAEAEBAAAAEAIABoBAAAFgAAACgAAAAQAAAAIAAAAAEAIAAAAAAAQAQAAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAHVEMP9sOBn/l3NY/5BrTv+AVTH/iF5G/wAAAACad2b/"
    "cDwe/3pMMv8AAAAAoH9n/39TMf+MZUX/iV9J/249K/98TTv/AAAAAAAAAADSw7j/jGRJ/18m"
    "Bf8AAAAAWh8B/9jLwP+niXj/hFpD/59+Zf98Ty3/l3Va/3RDJv9iLRv/iV9O/wAAAAAAAAAA"
    "Zi4Y/4BUOP/Itqn/AAAAAFQXAP/d0sn/r5SF/4JXP/+gf2f/ekwq/4lhQv9/Ujj/AAAAAEsO"
    "AP9KDgD/m3ts/35TQ/9uPzD/eU5I/wAAAAB9Ukj/XSke/1kjGf8AAAAAkGxa/2s5Iv95Tjn/"
    "bDss/wAAAACmjYb/sJaI/wAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAADMmQD/zJkA/8yZAP/MmQD/zJkA/8yZAP/MmQD/zJkA/8yZAP/MmQD/"
    "zJkA/8yZAP/MmQD/zJkA/8yZAP/MmQD/58yD/9eoLP/NmQX/zZkA/8yWAP/LlQD/2rJF/+LE"
    "bf/cuVT/0KAW/8uVAP/LlgD/zJkA/8yZAP/MmQD/zJkA/wAAAAAAAAAAAAAAAAAAAADx5Lz/"
    "9ezS/wAAAADkx3f/379j/+fQk//gwWz/zJkA/8yZAP/MmQD/zJkA/8yZAP8AAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAADVpzD/y5YA/8uXAP/LlgT/7dqq/wAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAAAAAAAAAADo0ZL/ypQA/8yZAP/MmQD/y5cA/9iwQv8AAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA6M+P/8qTAP/MmQD/zJkA/8uXAP/YrED/"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAADNkw//y5YA/8ya"
    "AP/JjgD/6dGb/wAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAANapNv/SoB3/48Jx/wAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAAAAA//8AAIEQAAAxAAAAMQAAAIEQAACf/wAAAAAAAAAAAADyAAAA/B8AAPgfAAD4HwAA"
    "/B8AAP4/AAD//wAA//8AAA=="
)
