import time
import nbs2dp
from nbs2dp import util


def main():
	parser = util.get_parser()
	args = parser.parse_args()
	t = time.time()
	info = nbs2dp.convert(**vars(args))
	taken = time.time() - t
	print(f"Saved to {info.output} in {util.round_min(round(taken, 3))} second(s).")
	print("Done!")

if __name__ == "__main__":
	main()
