"""
Captured macOS tool output used across the test suite.
"""

IFCONFIG = """lo0: flags=8049<UP,LOOPBACK,RUNNING,MULTICAST> mtu 16384
\toptions=1203<RXCSUM,TXCSUM,TXSTATUS,SW_TIMESTAMP>
\tinet 127.0.0.1 netmask 0xff000000
\tinet6 ::1 prefixlen 128
\tnd6 options=201<PERFORMNUD,DAD>
en0: flags=8863<UP,BROADCAST,SMART,RUNNING,SIMPLEX,MULTICAST> mtu 1500
\toptions=400<CHANNEL_IO>
\tether a4:83:e7:2b:4c:1d
\tinet6 fe80::1c8f:2b4e:9d1a:7e3f%en0 prefixlen 64 secured scopeid 0x6
\tinet 192.168.1.108 netmask 0xffffff00 broadcast 192.168.1.255
\tnd6 options=201<PERFORMNUD,DAD>
\tmedia: autoselect
\tstatus: active
en5: flags=8863<UP,BROADCAST,SMART,RUNNING,SIMPLEX,MULTICAST> mtu 1500
\tether ac:de:48:00:11:22
\tmedia: autoselect (1000baseT <full-duplex>)
\tstatus: inactive
bridge0: flags=8863<UP,BROADCAST,SMART,RUNNING,SIMPLEX,MULTICAST> mtu 1500
\tether 36:a1:2c:8b:00:40
\tstatus: inactive
awdl0: flags=8843<UP,BROADCAST,RUNNING,SIMPLEX,MULTICAST> mtu 1500
\tether 6e:91:5d:aa:bb:cc
\tinet6 fe80::6c91:5dff:feaa:bbcc%awdl0 prefixlen 64 scopeid 0xb
\tstatus: active
utun0: flags=8051<UP,POINTOPOINT,RUNNING,MULTICAST> mtu 1380
\tinet6 fe80::ce81:b1c:bd2c:69e%utun0 prefixlen 64 scopeid 0xf
gif0: flags=8010<POINTOPOINT,MULTICAST> mtu 1280
"""

IFCONFIG_NO_VPN = """lo0: flags=8049<UP,LOOPBACK,RUNNING,MULTICAST> mtu 16384
\tinet 127.0.0.1 netmask 0xff000000
en0: flags=8863<UP,BROADCAST,SMART,RUNNING,SIMPLEX,MULTICAST> mtu 1500
\tether a4:83:e7:2b:4c:1d
\tinet 192.168.1.108 netmask 0xffffff00 broadcast 192.168.1.255
\tstatus: active
"""

NETSTAT_IB = """Name       Mtu   Network       Address            Ipkts Ierrs     Ibytes    Opkts Oerrs     Obytes  Coll
lo0        16384 <Link#1>                          100     0      20000      100     0      20000     0
lo0        16384 127           127.0.0.1            100     -      20000      100     -      20000     -
en0        1500  <Link#6>    a4:83:e7:2b:4c:1d     5000     0    7000000     3000     0    1000000     0
en0        1500  192.168.1     192.168.1.108        4800     -    6900000     2900     -     990000     -
en5*       1500  <Link#7>    ac:de:48:00:11:22        0     0          0        0     0          0     0
"""

NETSTAT_RN = """Routing tables

Internet:
Destination        Gateway            Flags               Netif Expire
default            192.168.1.1        UGScg                 en0
127                127.0.0.1          UCS                   lo0
127.0.0.1          127.0.0.1          UH                    lo0
169.254            link#6             UCS                   en0

Internet6:
Destination                             Gateway                                 Flags               Netif Expire
default                                 fe80::%utun0                            UGcIg               utun0
::1                                     ::1                                     UHL                   lo0
"""

LSOF = """COMMAND     PID   USER   FD   TYPE             DEVICE SIZE/OFF NODE NAME
sshd        100   root    3u  IPv4 0x5a1b2c3d4e5f6a7b      0t0  TCP *:22 (LISTEN)
launchd       1   root   38u  IPv6 0x5a1b2c3d4e5f6a7c      0t0  TCP *:22 (LISTEN)
rapportd    512  alice    4u  IPv4 0x5a1b2c3d4e5f6a7d      0t0  TCP *:49152 (LISTEN)
ControlCe   601  alice    9u  IPv4 0x5a1b2c3d4e5f6a7e      0t0  TCP *:5000 (LISTEN)
screensha   733   root    5u  IPv4 0x5a1b2c3d4e5f6a7f      0t0  TCP *:5900 (LISTEN)
Safari      900  alice   21u  IPv4 0x5a1b2c3d4e5f6a80      0t0  TCP 192.168.1.108:52344->140.82.112.25:443 (ESTABLISHED)
"""

NETSTAT_AN = """Active Internet connections (including servers)
Proto Recv-Q Send-Q  Local Address          Foreign Address        (state)
tcp4       0      0  192.168.1.108.52344    140.82.112.25.443      ESTABLISHED
tcp4       0      0  192.168.1.108.52340    192.168.1.20.8009      ESTABLISHED
tcp4       0      0  127.0.0.1.6379         127.0.0.1.52000        ESTABLISHED
tcp4       0      0  *.22                   *.*                    LISTEN
tcp6       0      0  *.5900                 *.*                    LISTEN
tcp4       0      0  *.22                   *.*                    LISTEN
udp4       0      0  *.5353                 *.*
"""

PING_GATEWAY = """PING 192.168.1.1 (192.168.1.1): 56 data bytes
64 bytes from 192.168.1.1: icmp_seq=0 ttl=64 time=2.100 ms
64 bytes from 192.168.1.1: icmp_seq=1 ttl=64 time=3.300 ms
64 bytes from 192.168.1.1: icmp_seq=2 ttl=64 time=1.800 ms

--- 192.168.1.1 ping statistics ---
3 packets transmitted, 3 packets received, 0.0% packet loss
round-trip min/avg/max/stddev = 1.800/2.400/3.300/0.648 ms
"""

PING_LOSSY = """PING 8.8.8.8 (8.8.8.8): 56 data bytes
64 bytes from 8.8.8.8: icmp_seq=0 ttl=117 time=14.000 ms
Request timeout for icmp_seq 1
64 bytes from 8.8.8.8: icmp_seq=2 ttl=117 time=16.000 ms

--- 8.8.8.8 ping statistics ---
3 packets transmitted, 2 packets received, 33.3% packet loss
"""

PING_SILENT = """PING 10.255.255.1 (10.255.255.1): 56 data bytes
Request timeout for icmp_seq 0
Request timeout for icmp_seq 1

--- 10.255.255.1 ping statistics ---
3 packets transmitted, 0 packets received, 100.0% packet loss
"""

TRACEROUTE = """traceroute to 8.8.8.8 (8.8.8.8), 64 hops max, 52 byte packets
 1  router.local (192.168.1.1)  2.345 ms
 2  *
 3  10.20.0.1 (10.20.0.1)  12.001 ms
 4  72.14.215.85  15.5 ms
"""

VM_STAT = """Mach Virtual Memory Statistics: (page size of 16384 bytes)
Pages free:                               10000.
Pages active:                            200000.
Pages inactive:                          190000.
Pages speculative:                         5000.
Pages throttled:                              0.
Pages wired down:                        100000.
Pages purgeable:                           3000.
Pages occupied by compressor:            100000.
"""

PMSET_BATTERY = """Now drawing from 'Battery Power'
 -InternalBattery-0 (id=4653155)\t85%; discharging; 4:32 remaining present: true
"""

PMSET_AC = """Now drawing from 'AC Power'
 -InternalBattery-0 (id=4653155)\t100%; charged; 0:00 remaining present: true
"""

TOP = """Processes: 512 total, 3 running, 509 sleeping, 2371 threads
2024/05/14 10:15:02
Load Avg: 1.52, 1.61, 1.70
CPU usage: 12.5% user, 8.33% sys, 79.16% idle
"""

UPTIME = "10:15  up 3 days,  2:14, 2 users, load averages: 1.52 1.61 1.70\n"
