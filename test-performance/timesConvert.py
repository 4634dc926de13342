# Times the conversions over a small and a large number of serial days

import os
import time

import pyexceldate

smallIterations = 1000
largeIterations = os.environ.get('PYEXCELDATE_ITERATIONS')
if not largeIterations:
    largeIterations = str(smallIterations * 1000)
largeIterations = int(largeIterations)


def gettime():
    return time.time()


def toDate(count):
    for i in range(1, count + 1):
        pyexceldate.day2ymd(i)


def toSerial(count):
    for i in range(1, count + 1):
        pyexceldate.ymd2day(1900 + i % 8000, 1 + i % 12, 1 + i % 28)


# Begin SMALL_TO_DATE_ITERATIONS test
start = gettime()
toDate(smallIterations)
smallToDateElapsed = gettime() - start
print("Elapse time of SMALL_TO_DATE_ITERATIONS = %.4fs" % (smallToDateElapsed))

# Begin SMALL_TO_SERIAL_ITERATIONS test
start = gettime()
toSerial(smallIterations)
smallToSerialElapsed = gettime() - start
print("Elapse time of SMALL_TO_SERIAL_ITERATIONS = %.4fs" % (smallToSerialElapsed))

# Begin LARGE_TO_DATE_ITERATIONS test
start = gettime()
toDate(largeIterations)
largeToDateElapsed = gettime() - start
print("Elapse time of LARGE_TO_DATE_ITERATIONS = %.4fs" % (largeToDateElapsed))

# Begin LARGE_TO_SERIAL_ITERATIONS test
start = gettime()
toSerial(largeIterations)
largeToSerialElapsed = gettime() - start
print("Elapse time of LARGE_TO_SERIAL_ITERATIONS = %.4fs" % (largeToSerialElapsed))

ratio = largeIterations // smallIterations

if largeToDateElapsed > smallToDateElapsed * ratio * 2:
    print("Serial to date is too slow!")

if largeToSerialElapsed > smallToSerialElapsed * ratio * 2:
    print("Date to serial is too slow!")

print("\n")
