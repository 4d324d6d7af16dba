import json
import platform
import time

from solsysinfo import HardwareManager

global_start_time = time.time()

if platform.system() != "SunOS":
    print(f"OS: {platform.system()} (smbios is only available on Solaris and illumos)")
else:
    print("OS: Solaris")

hm = HardwareManager()

start_time = time.time()
hm.fetch_hardware_info()
end_time = time.time()
print("Computer System Discovery:", end_time - start_time)

print(f"Time taken: {end_time - global_start_time} seconds")

json_data = json.loads(hm.info.model_dump_json())

print(json.dumps(json_data, indent=2))
